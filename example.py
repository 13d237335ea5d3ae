import localetags

# For every language localetags has names for, show:
#
# - The language code
# - The language's name in English
# - The language's name in that language (its autonym)
# - Which way it's written

for code in sorted(localetags.data_dicts.LANGUAGE_NAMES):
    locale = localetags.Locale(code)
    print('%-3s %-20s %-20s %s' % (
        code, locale.display_name(), locale.native_name(),
        locale.text_direction().value
    ))

print()

# Choose a supported locale for some requested ones, the way an app would
# for a device locale.
config = localetags.LocaleConfig(['en', 'en_GB', 'ar', 'ar_EG', 'de'])
for tag in ['en-GB', 'ar_SA', 'de-AT', 'zh_Hans_CN', 'fr']:
    print('%-12s -> %s' % (tag, config.negotiate(tag)))
