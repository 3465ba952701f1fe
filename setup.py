"""Setup file for pop-pipelines package."""

from setuptools import setup, find_packages

setup(
    name="pop-pipelines",
    version="0.1.0",
    description="Imperative vs. declarative collection processing over a "
                "synthetic population",
    author="Michael Draugelis",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"pop_pipelines.config": ["configs/*.yaml",
                                           "configs/*/*.yaml"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "pandas>=1.3.0",
        "hydra-core>=1.3.0",
        "omegaconf>=2.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pop-pipelines=pop_pipelines.__main__:run",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Education",
    ],
)
