from setuptools import setup, find_packages

setup(
    name='command-console-core',
    version='1.0.0',
    description='Core platform for Command Console',
    packages=find_packages(),
    install_requires=[
        'command-console-api',
    ],
    entry_points={
        'console_scripts': [
            'command-console = console_platform.cli.repl:main',
        ],
    },
    python_requires='>=3.8',
)
