from setuptools import setup, find_packages

setup(
    name="css-inliner",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        'beautifulsoup4',
        'tinycss2',
        'requests',
        'urllib3',
        'validators',
        'chardet',
        'rcssmin',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    entry_points={
        'console_scripts': [
            'css-inliner=css_inliner.cli:main',
        ],
    },
    python_requires='>=3.8',
    description="Inline stylesheet rules into HTML elements and extract inline styles back into CSS",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
