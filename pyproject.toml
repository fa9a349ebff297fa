[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slbar"
version = "1.0.0"
description = "A small status monitor that joins system information into one status line for window-manager bars"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["status", "statusbar", "monitor", "system", "bar", "xsetroot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slbar = "slbar.status:main"

[tool.hatch.build.targets.wheel]
packages = ["slbar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
