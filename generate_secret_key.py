#!/usr/bin/env python3
import secrets
import base64
import os
import sys
from dotenv import dotenv_values

ENV_FILE = ".env"
EXAMPLE_FILE = ".env.example"
PLACEHOLDER = "SECRET_KEY=change-me"


def generate_secret_key(length=32):
    """Generate a secure random hex key from `length` random bytes"""
    return secrets.token_hex(length)


def generate_base64_secret_key(length=32):
    """Generate a URL-safe base64 encoded secret key"""
    return base64.urlsafe_b64encode(secrets.token_bytes(length)).decode('utf-8')


def update_env_file(secret_key, env_file=ENV_FILE):
    """Write SECRET_KEY into the .env file, creating it from .env.example when missing."""
    if not os.path.exists(env_file):
        if not os.path.exists(EXAMPLE_FILE):
            print(f"{env_file} does not exist and could not find {EXAMPLE_FILE}")
            return False
        with open(EXAMPLE_FILE, "r") as example_file:
            content = example_file.read()
        with open(env_file, "w") as out:
            out.write(content.replace(PLACEHOLDER, f"SECRET_KEY={secret_key}"))
        print(f"Created {env_file} with new secret key")
        return True

    current_key = dotenv_values(env_file).get("SECRET_KEY")
    if current_key:
        with open(env_file, "r") as file:
            content = file.read()
        with open(env_file, "w") as file:
            file.write(content.replace(f"SECRET_KEY={current_key}", f"SECRET_KEY={secret_key}"))
        print(f"Updated SECRET_KEY in {env_file}")
    else:
        with open(env_file, "a") as file:
            file.write(f"\nSECRET_KEY={secret_key}\n")
        print(f"Appended SECRET_KEY to {env_file}")
    return True


if __name__ == "__main__":
    hex_key = generate_secret_key()
    base64_key = generate_base64_secret_key()

    print("\n=== Glyzier Secret Key Generator ===")
    print(f"\nHex key (64 characters): {hex_key}")
    print(f"Base64 key (43 characters): {base64_key}")

    print("\nWhich key would you like to use?")
    print("1: Hex key")
    print("2: Base64 key")
    print("3: Just show keys, don't update files")

    choice = input("\nEnter choice (1-3): ")
    if choice == "1":
        selected_key = hex_key
    elif choice == "2":
        selected_key = base64_key
    elif choice == "3":
        print("No files updated.")
        sys.exit(0)
    else:
        print("Invalid choice. Exiting.")
        sys.exit(1)

    confirm = input(f"\nUpdate {ENV_FILE} with this key?\n{selected_key}\n\n(y/n): ")
    if confirm.lower() in ["y", "yes"]:
        update_env_file(selected_key)
    else:
        print("\nKey generated but not saved. Copy it into your .env file manually if needed.")
