"""DID-bound identities and secure boot chain verification."""