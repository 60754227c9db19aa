from setuptools import setup, find_packages

setup(
    name="print_size_suggester",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        line.strip()
        for line in open("requirements.txt")
        if line.strip() and not line.startswith("#")
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "print_size_suggester=print_size_suggester.main:main",
            "print-suggest=print_size_suggester.main:main",
        ],
    },
)
