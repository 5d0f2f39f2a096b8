from setuptools import setup, find_packages

setup(
    name="concli",
    version="0.1.0",
    description="Command tree argument parser and dispatcher with typed flags.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=("tests", "tests.*", "examples", "examples.*")),
    install_requires=[
        "rich",
        "prompt_toolkit",
        "pydantic>=2",
        "python-json-logger>=3",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
