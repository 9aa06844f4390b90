from setuptools import setup, find_namespace_packages

setup(
    name="bezier-arclength",
    version="0.1.0",
    description="Split cubic Bezier curves into pieces of equal arc length",
    python_requires=">=3.8",
    packages=find_namespace_packages(include=["maths", "maths.*", "utils", "utils.*", "resampler", "resampler.*"]),
    py_modules=["main"],
    install_requires=[
        "numpy",
        "colorlog",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "bezier-arclength=main:main",
        ],
    },
)
