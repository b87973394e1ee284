from setuptools import setup, find_packages

setup(
    name="subsweep",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "dnspython>=2.4",
        "requests",
        "backoff",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "subsweep = subsweep.cli:main",
        ],
    },
    description="Concurrent DNS brute forcer for subdomain enumeration",
    license="MIT",
    keywords="subdomain enumeration dns brute-force recon security",
)
