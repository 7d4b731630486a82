import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="usergraph",
    version="0.1.0",
    description="GraphQL user directory service",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    package_data={"usergraph": ["schema.graphql"]},
    python_requires=">=3.10",
    install_requires=[
        "graphql-core>=3.2,<3.3",
        "fastapi",
        "pydantic>=2",
        "starlette",
        "uvicorn",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "pytest-mock",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "usergraph=usergraph.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
