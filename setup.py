import os

from Cython.Build import cythonize
from setuptools import Extension, find_packages, setup

cythonized_extensions = cythonize(
    [
        Extension(
            "picosha3.hashes.keccak",
            ["src/picosha3/hashes/keccak.py"],
            extra_compile_args=[
                "-O3",
                "-Wno-unused-function",
                "-Wno-unused-variable",
            ],
            language="c",
        ),
    ],
    compiler_directives={
        "language_level": 3,
        "boundscheck": False,
        "wraparound": False,
        "cdivision": True,
        "infer_types": True,
        "nonecheck": False,
        "initializedcheck": False,
    },
    build_dir=os.path.join("build", "cython"),
)

if __name__ == "__main__":
    setup(
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        ext_modules=cythonized_extensions,
    )
