# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="embedfiles",
    version="0.1.0",
    description="Embed files and directories as base64 literals in generated JavaScript or Python modules",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'embedfiles=embedfiles.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
