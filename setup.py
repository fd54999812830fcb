from setuptools import find_packages, setup


setup(
    name="ricecombine",
    version="1.0.0",
    description="Amalgamate the Rice C++ headers into single-file headers under a renamed namespace",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ricecombine=ricecombine.cli:main"]},
)
