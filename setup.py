from setuptools import find_packages, setup

setup(
    name="moibit",
    version="0.1.0",
    packages=find_packages(include=["moibit", "moibit.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "requests",
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
            "fastapi",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "moibit=moibit.cli:cli",
        ],
    },
)
