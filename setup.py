"""Setup script for the inarow package."""

from setuptools import setup, find_packages
import os

# Read README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "Two-player N-in-a-row board games (tic-tac-toe, gomoku) with a console driver"

# Read requirements
def read_requirements():
    req_path = os.path.join(os.path.dirname(__file__), 'requirements.txt')
    if os.path.exists(req_path):
        with open(req_path, 'r', encoding='utf-8') as f:
            # Only include core dependencies, not optional ones
            lines = []
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    # Skip development dependencies that should be in extras_require
                    if not any(dep in line.lower() for dep in ['pytest', 'flake8', 'mypy']):
                        lines.append(line)
            return lines
    return ['click>=8.0']

setup(
    name="inarow",
    version="1.0.0",
    author="inarow contributors",
    description="Two-player N-in-a-row board games (tic-tac-toe, gomoku) with a console driver",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Board Games",
    ],
    python_requires=">=3.8",
    install_requires=read_requirements(),
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
            'flake8>=5.0',
            'mypy>=1.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'inarow=inarow.cli:run',
        ],
    },
    keywords=[
        'tic-tac-toe', 'gomoku', 'five-in-a-row', 'board-game', 'cli',
    ],
    include_package_data=True,
    zip_safe=False,
)
