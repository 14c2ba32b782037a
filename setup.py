from setuptools import setup, find_packages

setup(
    name="bin-tally",
    version="0.1.0",
    description="Tally a file of packed 12-bit values: largest 32 occurrences and last 32 values",
    author="adamfilli",
    packages=find_packages(include=["bintally", "bintally.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "bintally=bintally.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
