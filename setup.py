from setuptools import setup, find_packages  # type: ignore
import re

# The version number lives in a single place, src/specfun/version.py,
# which is also what `specfun.version.number` reports at runtime.
with open("src/specfun/version.py") as f:
    version = re.search(r'number\s*=\s*"([^"]+)"', f.read()).group(1)  # type: ignore

setup(
    name="specfun",
    version=version,
    description="Special functions: orthogonal polynomials, elliptic, exponential and theta functions",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
        "scipy>=1.10",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
