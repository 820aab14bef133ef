import setuptools

setuptools.setup(
    name='touchkit',
    packages=setuptools.find_packages(exclude=['tests']),
    version='0.1.0',
    author='voussoir',
    author_email='pypi@voussoir.net',
    description='touch, with -r, -t and friends, in python',
    long_description=open('README.md', 'r').read(),
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    install_requires=[
        'colorama',
        'pyperclip',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'touchkit=touchkit.touch:entry',
        ],
    },
)
