from setuptools import setup, find_packages

setup(
    name="polyrecover",
    version="1.0",
    description="Exact recovery of polynomial coefficients from points given as numerals in arbitrary bases",
    long_description=("Recovers the unique polynomial of degree k-1 through k points whose values are encoded in "
                      "bases 2 to 36, using Gauss-Jordan elimination over exact rational numbers"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.9",
    packages=find_packages(include=["polyrecover", "polyrecover.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={
        "flint": ["python-flint"],
        "test": ["pytest", "pytest-timeout"],
    },
    entry_points={"console_scripts": ["polyrecover = polyrecover.cli:main"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["polynomial", "interpolation", "rational arithmetic", "gauss-jordan"],
    zip_safe=False,
)
