from setuptools import setup, find_packages

setup(
    name='nftlib',
    version='0.1',
    description='Run nft commands and read its JSON listings',
    url='',
    author='Matchlighter',
    author_email='ml@matchlighter.net',
    license='MIT',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.10',
    install_requires=[
        'ansibleguy-nftables',
        'pyyaml',
        'typer',
        'typing_extensions',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'nftlib = nftlib.cli:app'
        ]
    }
)
