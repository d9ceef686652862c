import setuptools
from os.path import join, dirname

def get_file_contents(filename):
    package_directory = dirname(__file__)
    with open(join(package_directory, filename), 'r', encoding='utf-8') as file:
        contents = file.read()
    return contents

long_description = """Spatial contingency table (co-occurrence) statistics for pairs of ion types
in atom probe tomography reconstructions. See `DESIGN.md` for the method.
"""
version = get_file_contents(join('contingencytable3d', 'version.txt')).strip()

setuptools.setup(
    name='contingencytable3d',
    version=version,
    description='Contingency tables of ion co-occurrence in spatial blocks of 3D point clouds.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=[
        'contingencytable3d',
        'contingencytable3d.standalone_utilities',
        'contingencytable3d.ion_data',
        'contingencytable3d.analysis',
        'contingencytable3d.analysis.scripts',
        'contingencytable3d.reporting',
        'contingencytable3d.entry_point',
    ],
    classifiers=[
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Intended Audience :: Science/Research',
    ],
    package_data={
        'contingencytable3d': [
            'version.txt',
        ],
        'contingencytable3d.analysis.scripts': [
            'run.py',
        ],
    },
    python_requires='>=3.10',
    entry_points={
        'console_scripts' : [
            'ct3d = contingencytable3d.entry_point.cli:main_program',
        ]
    },
    install_requires=[
        'numpy>=1.22.3',
        'scipy>=1.8.0',
        'pandas>=1.1.5',
        'tabulate>=0.8.9',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
