from setuptools import setup, find_packages

setup(
    name="ftree",
    version="0.1.0",
    description="Fenwick tree (binary indexed tree) for prefix sums",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.6",
)
