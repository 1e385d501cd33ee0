import setuptools

# As with the version number in pqadmin/__init__.py, VERSION is the single source of truth.
with open("pqadmin/VERSION") as f:
    VERSION = f.read().strip()

with open("README.md") as f:
    LONG_DESCRIPTION = f.read()

LICENSE = "BSD-3-Clause"

setuptools.setup(
    name="pqadmin",
    version=VERSION,
    description="Mount, list, inspect, unlink and unmount Linux POSIX message queues",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license=LICENSE,
    python_requires=">=3.8",
    packages=["pqadmin"],
    package_data={"pqadmin": ["VERSION"]},
    # posix_ipc does the mq_open()/mq_getattr()/mq_unlink() work. mount(2) and umount(2) are
    # called via ctypes, so they need nothing beyond the standard library.
    install_requires=["posix_ipc"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["pq = pqadmin.cli:console_main"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Systems Administration",
    ],
)
