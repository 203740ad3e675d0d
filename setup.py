from setuptools import setup, find_packages

setup(
    name="rdfVocab",
    version="0.1.0",
    description="Vocabulary and term registry for RDF namespaces",
    author="Your Name",
    author_email="you@example.com",
    packages=find_packages(include=["rdfVocab", "rdfVocab.*"]),
    package_data={"rdfVocab": ["data/vocab.yml"]},
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "rdflib>=6.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["rdfVocab=rdfVocab.cli.__main__:main"],
    },
    license="MIT",
)
