from setuptools import setup, find_packages

setup(
    name="stylerun",
    version="0.1.0",
    description="Fluent builder for styled text runs with automatic offset tracking",
    packages=find_packages(include=["stylerun", "stylerun.*"]),
    install_requires=[
        "regex",
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
