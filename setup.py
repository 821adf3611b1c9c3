from setuptools import setup, find_packages

setup(
    name="uploadcare-loader",
    version="1.0.0",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'python-dotenv>=1.0.0',
        'typing-extensions>=4.5.0',
        'prettytable>=3.0.0',  # For formatted table output
        'concurrent-log-handler>=0.9.20',  # For better logging with concurrency
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'uploadcare-loader=uploadcare_loader.main:main',
        ],
    },
    python_requires='>=3.8',
    description="Rewrites image sources into Uploadcare CDN transformation URLs",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Multimedia :: Graphics",
    ],
)
