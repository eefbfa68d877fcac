from setuptools import find_packages, setup

main_package = "httpstatus"
current_version = "1.0.0"

setup(
    name="httpstatus",
    version=current_version,
    description="Named constants for the registered HTTP status codes",
    license="MIT",
    keywords=["http", "status", "codes", "rest", "api"],
    packages=find_packages(where=".", exclude=["tests*"]),
    package_data={main_package: ["py.typed"]},
    python_requires=">=3.8.0",
    install_requires=[
        # Utilities
        "loguru",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "Faker",
        ]
    },
    classifiers=[
        "Programming Language :: Python",
        "Intended Audience :: Developers",
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
    ],
)
