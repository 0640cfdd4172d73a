import setuptools

with open('README.md') as infile:
    long_description = infile.read()

with open('VERSION') as infile:
    version = infile.read().strip()

setuptools.setup(
    name='saintelague',
    version=version,
    description='Sainte-Laguë parliament seat allocation for Python',
    long_description=long_description,
    long_description_content_type='text/markdown; charset=UTF-8',
    python_requires='>=3.7.0',
    packages=setuptools.find_packages(exclude=('tests', )),
    install_requires=[],
    extras_require={
        'test': ['pytest'],
        'docs': ['sphinx', 'recommonmark'],
    },
    entry_points={
        'console_scripts': ['saintelague=saintelague.__main__:run'],
    },
    include_package_data=True,
    license='MIT',
    keywords='voting election apportionment sainte-lague webster parliament',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True
)
