from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="indexwalk",
    version="0.1.0",
    description="Indexed eager and lazy traversal over any enumerable container.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.13",
    install_requires=["greenlet>=3.0"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
)
