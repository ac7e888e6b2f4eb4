"""
fb_contacts_page.py

Pull contacts out of a saved Facebook friends page by scanning for fixed
markers in the raw html. The markers match one snapshot of Facebook's markup;
subclass `ContactsPageSchema` if the export format changes.
"""

import html

FACEBOOK_LINK = "https://www.facebook.com/"


class ContactExtractionError(Exception):
    """Raised when a contact fragment is missing a field it must have."""


class ContactsPageSchema:
    """Marker strings and scanning rules for the friends page export."""

    contact_marker = (
        '<div data-visualcompletion="ignore-dynamic" '
        'style="padding-left: 8px; padding-right: 8px;">'
    )
    link_prefix = FACEBOOK_LINK
    name_prefix = '<svg aria-label="'
    terminator = '"'

    def find_contacts(self, document):
        """Split `document` into contact fragments, in document order.

        Empty fragments are dropped.
        """
        return [
            fragment for fragment in document.split(self.contact_marker)
            if fragment
        ]

    def extract_link(self, fragment):
        """Return the first Facebook link in `fragment`, or None if it has none.

        Fragments without a link are page decoration, not contacts.
        """
        link_start = fragment.find(self.link_prefix)
        if link_start == -1:
            return None

        link_end = fragment.find(self.terminator, link_start)
        if link_end == -1:
            link_end = len(fragment)

        return fragment[link_start:link_end]

    def extract_name(self, fragment):
        name_index = fragment.find(self.name_prefix)
        if name_index == -1:
            raise ContactExtractionError("Cannot extract contact name.")

        name_start = name_index + len(self.name_prefix)
        name_end = fragment.find(self.terminator, name_start)
        if name_end == -1:
            raise ContactExtractionError("Contact name is not terminated.")

        return html.unescape(fragment[name_start:name_end])
