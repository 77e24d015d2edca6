from setuptools import setup

version = {}
with open('smrange/version.py', 'r') as f:
    exec(f.read(), version)

with open('README.md', 'r') as f:
    long_description = f.read()

setup(
    name='smrange',
    version=version['__version__'],
    description='Studentised maximum range distribution: probabilities, quantiles, and tables',
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.19',
        'scipy>=1.7',
        'markdown>=3.3',
        'pyyaml>=5.4',
        ],
    extras_require={'test': ['pytest']},
    packages=['smrange', 'smrange.common', 'smrange.report'],
    entry_points={
        'console_scripts': ['smrange = smrange.__main__:main_query',
                            'smrangetbl = smrange.__main__:main_table',
                            'smrangef = smrange.__main__:main_setup',
                            ],
        },
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Operating System :: OS Independent',
        'Topic :: Scientific/Engineering :: Mathematics',
        ]
    )
