from setuptools import setup, find_packages
import re

# Read version from allowance/__init__.py
with open('allowance/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='pay-allowance',
    version=version,
    packages=find_packages(include=['allowance', 'allowance.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
            'mcp[cli]>=1.0.0,<2',
        ],
    },
    entry_points={
        'console_scripts': [
            'allowance=allowance.cli.__main__:main',
            'allowance-mcp=allowance.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Daily spending allowance across a monthly pay period.',
    python_requires='>=3.10',
)
