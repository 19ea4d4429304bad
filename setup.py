# --------------------------- ONLY FOR DEVELOPMENT MODE ---------------------------
# This setup.py file is used to configure the setup for the pydistmesh project.
# It specifies metadata about the project and its dependencies.
# Install the project in an editable state with `pip install -e .`, add
# `.[test]` for the test suite and `.[plot]` for the demos.

from setuptools import find_packages, setup

setup(
    name="pydistmesh",
    version="0.1.0",
    description="DistMesh simplex mesh generation from signed distance functions",
    packages=find_packages(include=["pydistmesh", "pydistmesh.*"]),
    include_package_data=True,
    install_requires=[
        "numpy",
        "scipy>=1.8",
    ],
    extras_require={
        "plot": ["matplotlib"],
        "test": ["pytest"],
    },
    classifiers=["Programming Language :: Python :: 3"],
    python_requires=">=3.8",
)
