from setuptools import find_packages, setup

setup(
    name="fetchtool",
    version="1.0.0",
    description="Fetch a URL with retries and write the body to a file or stdout",
    packages=find_packages(include=["fetchtool", "fetchtool.*"]),
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.5.2",
        "tenacity>=8.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fetchtool=fetchtool.cli:main",
        ],
    },
    python_requires=">=3.9",
)
