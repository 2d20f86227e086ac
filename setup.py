from setuptools import find_packages, setup

setup(
    name="dms",
    version="0.1.0",
    description="DMS - external links mirrored as editable proxy documents",
    author="William Wieselquist",
    packages=find_packages(include=["dms", "dms.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "watchdog",  # File system monitoring
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and record models
        "typer<0.26",  # CLI (0.26+ vendors click; code imports click directly)
        "click",  # CLI exceptions and context
        "pyyaml",  # YAML output and tag registry front matter
        "pygments",  # Highlighted CLI output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "dms=dms.cli:main",
        ],
    },
)
