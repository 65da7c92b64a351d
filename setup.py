from setuptools import setup

setup(
    name="spell",
    version="0.1.0",
    description="Indentation-based markup language that compiles to HTML documents",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=['spell'],
    python_requires=">=3.8",
    install_requires=[
        "watchdog",
        "pyyaml",
        "markdown",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
