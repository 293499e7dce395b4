from setuptools import setup, find_packages

setup(
    name="hcard_index",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic",
        "charset-normalizer",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
