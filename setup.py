"""安装脚本"""

from setuptools import find_packages, setup

setup(
    name="dockalias",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "typer[all]>=0.9.0",
        "rich>=13.4.2",
        "python-dotenv>=1.0.0",
        "questionary>=2.0.0",
        "click>=8.0.0",
        "shellingham>=1.5.0",
        "loguru>=0.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dkr=dockalias.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Docker快捷命令和shell别名工具",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    keywords="docker, container, alias, cli, shell",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Systems Administration",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
)
