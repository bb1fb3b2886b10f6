from setuptools import setup, find_packages

with open("requirements.txt", "r") as fs:
    reqs = [r for r in fs.read().splitlines() if (len(r) > 0 and not r.startswith("#"))]

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="netconf-explorer",
    version="0.1.0",
    packages=find_packages(exclude=["test", "test.*"]),
    author="Nokia",
    author_email="",
    description="Schema-scoped data retrieval and filtered tree views for NETCONF devices",
    classifiers=[
        "Topic :: Utilities",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Natural Language :: English",
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
    ],
    include_package_data=True,
    install_requires=reqs,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    long_description=long_description,
    long_description_content_type="text/markdown",
)
