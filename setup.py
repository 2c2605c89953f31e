from setuptools import setup, find_packages

setup(
    name="openapi-mcp-server",
    version="1.0.1",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        "httpx>=0.27",
        "mcp>=1.10,<2",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "openapi-mcp-server=openapi_mcp_server.cli:main",
        ],
    },
    description="Serve the operations of an OpenAPI specification as MCP tools",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)
