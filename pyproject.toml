[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lpmgui"
version = "0.1.0"
description = "A graphical Linux process manager with live CPU and memory statistics"
requires-python = ">=3.10"
keywords = ["process", "monitor", "procfs", "linux", "task-manager", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lpmgui = "lpmgui.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["lpmgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
