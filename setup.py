from setuptools import setup


LONG_DESC = """
localetags reads locale tags such as 'en_US', 'zh-Hans' and 'sr_Latn_RS',
chooses the best of an application's supported locales for the locale a
user asked for, tells you which languages are written right-to-left, and
gives the names of languages in English and in their own script.
"""


setup(
    name="localetags",
    version='1.0.0',
    license="MIT",
    platforms=["any"],
    description="Parses, matches, and names locale tags",
    long_description=LONG_DESC,
    packages=['localetags'],
    include_package_data=True,
    install_requires=['marisa-trie'],
    python_requires='>=3.6',
    tests_require=['pytest'],
    extras_require={
        'test': ['pytest']
    },
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Software Development :: Localization",
    ],
)
