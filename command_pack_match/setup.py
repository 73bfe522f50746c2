from setuptools import setup, find_packages

setup(
    name='command-pack-match',
    version='1.0.0',
    description='Wildcard matching commands for Command Console',
    packages=find_packages(),
    install_requires=[
        'command-console-api',
    ],
    entry_points={
        'command_console.command_pack': [
            'match = command_pack_match.plugin:MatchCommandPack',
        ],
    },
    python_requires='>=3.8',
)
