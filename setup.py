# setup.py
from setuptools import setup, find_packages

setup(
    name="paw_scout",
    version="0.1.0",
    description="Cross-checks pet adoption listings across rescue sites",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"paw_scout.report": ["templates/*.j2"]},
    include_package_data=True,
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["paw_scout=paw_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
