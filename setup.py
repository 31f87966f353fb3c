"""
Setup script for the job board project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="job-board",
    version="0.1.0",
    packages=find_packages(include=["src", "src.*", "frontend", "frontend.*"]),
    py_modules=["version"],
    package_data={"frontend": ["templates/*.html"]},
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.29",
        "jinja2>=3.1",
        "python-multipart>=0.0.9",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "pymongo>=4.13",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "pytest-mock>=3.12",
            "httpx>=0.27",
        ],
    },
)
