from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "jinja2>=3.1",
    "pydantic>=2.0",
    "typer>=0.9",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="el2md",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"el2md.rendering": ["templates/*.j2"]},
    include_package_data=True,
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "el2md=el2md.cli.main:run",
        ],
    },
    python_requires=">=3.9",
    description="Convert the Commentary section of Emacs Lisp files to Markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
