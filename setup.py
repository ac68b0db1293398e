from setuptools import setup, find_packages

setup(
    name='wmap',
    version='0.1dev',
    description='Tools for decoding and inspecting WorldMap.dat files',
    packages=find_packages(include=['wmap', 'wmap.*']),
    license='MIT',
    python_requires='>=3.7',
    install_requires=[
        'numpy',
        'Pillow',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'wmap-dump=wmap.cmds.process_world_map:main',
        ],
    },
)
