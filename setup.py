import os

from setuptools import setup

proj_root = os.path.abspath(os.path.dirname(__file__))

def read_version():
    with open(os.path.join(proj_root, "lifedispatch", "__init__.py"), "r", encoding="utf-8") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"')

    raise RuntimeError("Unable to find __version__ in lifedispatch/__init__.py")

setup(
    name="lifedispatch",
    packages=["lifedispatch", "lifedispatch.base", "lifedispatch.codegen", "lifedispatch.shader_generation"],
    package_data={
        "lifedispatch": ["assets/*.wgsl", "assets/shared/*.wgsl"],
    },
    install_requires=[
        "numpy",
    ],
    extras_require={
        "cli": ["click"],
        "test": ["pytest", "click"],
    },
    entry_points={
        "console_scripts": [
            "lifedispatch = lifedispatch.cli:cli_entrypoint",
        ],
    },
    python_requires=">=3.8",
    version=read_version(),
    zip_safe=False,
)
