from setuptools import find_packages, setup

setup(
    name='ninep-wire',
    version='1.0.0',
    description='Bounds-checked codecs for the 9P2000 wire types (integers, Qid, Data, Stat)',
    author='isantolin',
    author_email='',
    packages=find_packages(include=['ninewire', 'ninewire.*']),
    python_requires='>=3.11',
    install_requires=[
        'construct',
        'msgspec>=0.18',
        'marshmallow>=3.13',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
    entry_points={
        'console_scripts': [
            'ninewire-stat=ninewire.tools.stat_debug:main',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: POSIX :: Linux',
    ],
)
