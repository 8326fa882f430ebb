from setuptools import setup, find_packages

setup(
    name="linuxdeploy-plugin-polyfill-glibc",
    version="0.1.0",
    description="linuxdeploy插件：使用polyfill-glibc降低AppDir的GLIBC版本需求",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        'click>=8.0.0',
        'rich>=10.0.0',
        'PyYAML>=5.4',
        'pyelftools>=0.29',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'linuxdeploy-plugin-polyfill-glibc=ldpglibc.cli.main:cli',
        ],
    },
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Build Tools',
        'Programming Language :: Python :: 3.8',
    ],
)
