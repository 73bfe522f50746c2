from setuptools import setup, find_packages

setup(
    name='command-console-api',
    version='1.0.0',
    description='API library with abstractions for Command Console',
    packages=find_packages(),
    python_requires='>=3.8',
)
