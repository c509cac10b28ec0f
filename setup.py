import os

from setuptools import setup, find_packages

install_requires = [
    "graphql-core>=3.2,<3.3",
    "yarl>=1.6,<2.0",
    "requests>=2.26,<3",
]

console_scripts = [
    "gql-http-cli=gql_http.cli:gql_http_cli",
]

tests_requires = [
    "aiohttp>=3.11.2,<4",
    "pytest==8.3.4",
    "pytest-asyncio==0.25.3",
    "pytest-console-scripts==1.4.1",
    "pytest-cov==6.0.0",
]

dev_requires = [
    "black==25.1.0",
    "check-manifest>=0.42,<1",
    "flake8==7.1.2",
    "isort==6.0.1",
    "mypy==1.15",
    "types-requests",
] + tests_requires

# Get version from __version__.py file
current_folder = os.path.abspath(os.path.dirname(__file__))
about = {}
with open(os.path.join(current_folder, "gql_http", "__version__.py")) as f:
    exec(f.read(), about)

setup(
    name="gql-http",
    version=about["__version__"],
    description="Minimal HTTP transport executing GraphQL operations",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="api graphql http client transport",
    packages=find_packages(include=["gql_http*"]),
    install_requires=install_requires,
    extras_require={
        "test": tests_requires,
        "dev": dev_requires,
    },
    include_package_data=True,
    zip_safe=False,
    platforms="any",
    entry_points={"console_scripts": console_scripts},
)
