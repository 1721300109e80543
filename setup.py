from setuptools import find_packages, setup

setup(
    name="cmdparse",
    version="1.0.0",
    description="Library to parse simple command line options and commands.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="cmdparse contributors",
    packages=find_packages(include=("cmdparse", "cmdparse.*")),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "toml>=0.10",
        "python-dateutil>=2.8",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["cmdparse=cmdparse.__main__:main_entry"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 4 - Beta",
    ],
)
