[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hostmat"
version = "1.0.0"
description = "Dense host matrices with tolerance-aware comparison, fills, reductions, matmul, transpose and Frobenius norm"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["matrix", "linear-algebra", "matmul", "transpose", "norm", "numpy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hostmat-demo = "hostmat.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["hostmat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
