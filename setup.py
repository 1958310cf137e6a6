from setuptools import setup, find_packages

setup(
    name="css-variants",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        'csscompressor',
        'cssutils',
        'orjson',
        'typing-extensions'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov'
        ]
    },
    python_requires='>=3.8',
    description="Generate CSS utility classes with variant prefixes and option families",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
