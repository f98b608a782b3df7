"""Tests for :mod:`tokenauth.credentials.passwords`."""

import string
from unittest import TestCase

from hypothesis import given, settings
from hypothesis import strategies as st

from .. import passwords
from ..exceptions import PasswordAuthenticationFailed, ValidationFailed


class TestPasswords(TestCase):
    """Hashing and checking of passwords."""

    def test_check_passwords_successful(self):
        """A password checks against its own hash."""
        for passw in ['foo', 'correct horse battery staple', 'пароль', 'x']:
            encrypted = passwords.hash_password(passw, rounds=4)
            passwords.check_password(passw, encrypted)

    def test_bcrypt_format(self):
        """Hashes are bcrypt hashes, and salted."""
        first = passwords.hash_password('foo', rounds=4)
        second = passwords.hash_password('foo', rounds=4)
        self.assertTrue(first.startswith('$2'))
        self.assertNotEqual(first, second)
        self.assertNotIn('foo', first)

    def test_wrong_password(self):
        """Another password does not check."""
        encrypted = passwords.hash_password('foo', rounds=4)
        with self.assertRaises(PasswordAuthenticationFailed):
            passwords.check_password('bar', encrypted)

    def test_unusable_hash(self):
        """A stored value that is not a bcrypt hash never checks."""
        for encrypted in ['', 'plaintext', 'héllo']:
            with self.assertRaises(PasswordAuthenticationFailed):
                passwords.check_password('plaintext', encrypted)

    def test_too_long(self):
        """Passwords beyond bcrypt's input limit cannot be hashed."""
        with self.assertRaises(ValidationFailed):
            passwords.hash_password('x' * 73, rounds=4)
        encrypted = passwords.hash_password('x' * 72, rounds=4)
        passwords.check_password('x' * 72, encrypted)
        with self.assertRaises(PasswordAuthenticationFailed):
            passwords.check_password('x' * 73, encrypted)

    def test_placeholder_hash(self):
        """The placeholder is a bcrypt hash at the requested cost."""
        placeholder = passwords.placeholder_hash(rounds=4)
        self.assertTrue(placeholder.startswith('$2b$04$'))
        self.assertEqual(passwords.placeholder_hash(rounds=4), placeholder)
        for passw in ['', 'foo', placeholder]:
            with self.assertRaises(PasswordAuthenticationFailed):
                passwords.check_password(passw, placeholder)

    @given(st.text(alphabet=string.printable, max_size=40),
           st.text(st.characters(exclude_characters='\x00'), max_size=40))
    @settings(max_examples=25, deadline=None)
    def test_check_passwords_fuzz(self, passw, fuzzpw):
        """Only the hashed password checks."""
        encrypted = passwords.hash_password(passw, rounds=4)
        if passw == fuzzpw:
            passwords.check_password(fuzzpw, encrypted)
        else:
            with self.assertRaises(PasswordAuthenticationFailed):
                passwords.check_password(fuzzpw, encrypted)
