from setuptools import setup, find_packages

# Minimal setup.py for editable installs (pip install -e .)
setup(
    name="cranes-ai",
    version="0.1.0",
    description="Crane unloading path search: exhaustive and dynamic-programming solvers",
    packages=find_packages(exclude=("tests", "runs", "docs")),
    python_requires=">=3.10",
    install_requires=[
        "torch",
        "numpy",
        "PyYAML",
        "matplotlib",
        "seaborn",
    ],
    extras_require={"test": ["pytest"]},
)
