"""Test doubles for goctlkit collaborators."""
