from setuptools import setup, find_packages

setup(
    name="viewstyle",
    version="0.1.0",
    description="Declarative style configurations for terminal views",
    packages=find_packages(include=["viewstyle", "viewstyle.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.12",
)
