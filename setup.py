"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from VERSION
with open(ver_file, 'r') as f:
    __version__ = f.read().strip()

if re.match(r'^\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?$', __version__) is None:
    raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geoshift",
    version=__version__,
    author="",
    author_email="",
    description="Conversions between the WGS-84, GCJ-02 and BD-09 map frames used in China.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geoshift*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"geoshift": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': [
            'numpy>=1',
            'pytest',
        ],
    },
)
