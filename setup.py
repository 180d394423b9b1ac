import setuptools

setuptools.setup(
    name="tiny-pgctl",
    version="0.1.0",
    description="A thin wrapper around pg_ctl status",
    packages=["tiny_pgctl"],
    python_requires=">=3.8",
    install_requires=[
        "typer",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "tiny-pgctl=tiny_pgctl.__main__:main",
        ],
    },
)
