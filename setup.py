from setuptools import find_packages, setup

requirements = ["numpy", "pandas>=2.0", "loguru"]

setup(
    name="servosphere",
    version="0.1.0",
    description="Derived movement variables from servosphere recordings",
    install_requires=requirements,
    extras_require={
        "dev": [
            "black",
            "pytest-cov",
            "pytest",
            "coverage",
        ]
    },
    python_requires=">=3.10",
    packages=find_packages(exclude=("docs", "tests*")),
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
    ],
    zip_safe=False,
)
