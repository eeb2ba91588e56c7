from setuptools import setup, find_packages

setup(
    name="writ",
    version="0.1.0",
    description="GNU getopt_long style argument decoding with subcommands.",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["writ", "writ.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13",
        "python-json-logger>=3.1",
        "pydantic>=2",
        "PyYAML>=6",
        "toml>=0.10",
        "python-dateutil>=2.8",
    ],
    extras_require={"test": ["pytest>=8"]},
    entry_points={"console_scripts": ["writ=writ.__main__:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
