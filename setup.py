from setuptools import setup, find_packages

setup(
    name="checkstyle-regression-tools",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "gitpython>=3.1.0",
        "requests>=2.25.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "black>=20.8b1",
            "isort>=5.7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fetch-checkstyle=fetcher.cli:main",
            "generate-configs=config_generator.cli:main",
        ]
    },
    description="Automation for Checkstyle regression-test configuration fixtures",
    keywords="checkstyle, regression, configuration",
)
