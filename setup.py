from setuptools import setup, find_packages

setup(
    name="fixedrational",
    version="1.0",
    description="Exact rational numbers over signed 64-bit integers",
    long_description=("Exact rational number value type with a fixed-width (signed 64-bit) numerator and denominator, "
                      "kept in canonical lowest-terms form, with overflow-checked arithmetic and an overflow-free "
                      "order comparison"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["fixedrational", "fixedrational.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational", "fraction", "exact arithmetic", "overflow"],
    zip_safe=False,
)
