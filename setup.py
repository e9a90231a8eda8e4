import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="object-helpers",
    version="0.1.0",
    author="",
    author_email="",
    description="Helpers for object introspection and validated method invocation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=[
        "attrs",
        "rich",
        "typeguard>=4",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    packages=setuptools.find_packages(include=["object_helpers", "object_helpers.*"]),
    python_requires=">=3.10",
)
