import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="permanents",
    version="0.1.0",
    author="permanents",
    description="Exact and randomized matrix and tensor permanents for boson sampling",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=['permanents', 'permanents.algorithms', 'permanents.backends', 'permanents.utils',
              'permanents.utils.logging'],
    install_requires=['numpy', 'sympy', 'platformdirs'],
    extras_require={"test": ["pytest", "pytest-cov"], "benchmark": ["pytest-benchmark"]},
    python_requires=">=3.9",
)
