import os

from setuptools import find_packages, setup


here = os.path.abspath(os.path.dirname(__file__))
about = {}
with open(
    os.path.join(here, "src", "accumtools", "__init__.py"), encoding="utf-8"
) as f:
    for line in f:
        if line.startswith("__version__"):
            exec(line, about)  # pylint: disable=exec-used
            break


setup(
    name="accumtools",
    version=about["__version__"],
    description="Lazy iterator adaptors: running fold (prefix-scan)",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
    ],
)
