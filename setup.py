from setuptools import find_packages, setup

# The version is defined in the package itself
version = {}
with open("src/motifseek/__init__.py") as file:
    for line in file:
        if line.startswith("__version__"):
            exec(line, version)
            break

with open("README.rst") as file:
    long_description = file.read()

setup(
    name="motifseek",
    version=version["__version__"],
    description="Nucleotide sequence analysis and motif discovery",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"": ["*.pyi"]},
    install_requires=["numpy >= 1.25"],
    extras_require={
        "test": ["pytest"],
        "benchmark": ["pytest", "pytest-codspeed"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
)
