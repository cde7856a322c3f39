from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = list(f.read().splitlines())

# Parse the version from the mapanalyzer module.
with open('mapanalyzer/__init__.py') as f:
    for line in f:
        if line.find("__version__") >= 0:
            version = line.split("=")[1].strip()
            version = version.strip('"')
            version = version.strip("'")
            continue

setup(
    name="mapanalyzer",
    version=version,
    packages=find_packages(exclude=['test', 'test.*']),
    description="Python library for analyzing road maps and their "
                "barely connected (minimum spanning) networks",
    long_description=open("README.md").read(),
    package_data={'mapanalyzer': ['*.json']},
    include_package_data=True,
    install_requires=required,
    extras_require={'test': ['pytest']},
    scripts=['scripts/run_mapanalyzer.py']
)
