from pathlib import Path

from setuptools import setup

readme = Path(__file__).parent.joinpath('README.md')
if readme.exists():
    with readme.open() as f:
        long_description = f.read()
        try:
            from pypandoc import convert_text
            long_description = convert_text(long_description, 'rst', format='md')
        except ImportError:
            print("warning: pypandoc module not found, could not convert Markdown to RST")
else:
    long_description = '-'

setup(
    name='collection-utils',
    version='0.1.0',
    description='An ordered mapping with array-style helpers',
    long_description=long_description,
    python_requires='>=3.6',
    packages=[
        'collection_utils',
    ],
    license='MIT',
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
