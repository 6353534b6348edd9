#!/usr/bin/env python
from pathlib import Path

from setuptools import setup, find_packages

from dicom_query import __version__

EXTRA = {}

BASE_PATH = Path(__file__).parent.absolute()
with open(BASE_PATH / 'README.md') as f:
    long_description = f.read()


setup(
    name="dicom-query",
    packages=find_packages(),
    include_package_data=True,
    version=__version__,
    install_requires=['pydicom>=2.3'],
    extras_require={'test': ['pytest', 'pyfakefs']},
    description="Reads DICOM query files into tags and matching attributes",
    keywords="dicom python query",
    entry_points={
        'console_scripts': [
            'dump_query=dicom_query.dump_query:main',
        ]
    },
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Developers",
        "Intended Audience :: Healthcare Industry",
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
        'Operating System :: MacOS',
        "Operating System :: Microsoft :: Windows",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
    ],
    long_description=long_description,
    long_description_content_type='text/markdown',
    **EXTRA
)
