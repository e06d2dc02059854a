#!/usr/bin/env python3
"""
Build a PKCS#12 trust store from PEM CA certificates.

The result can be used as TRUSTSTORE_PATH (default
./truststore/mongo-truststore.jks). Java's keytool reads it as well.

Usage:
    python scripts/make_truststore.py ca.pem
    python scripts/make_truststore.py ca.pem other-ca.pem --out truststore/mongo-truststore.jks --password changeit
"""

import argparse
import os
import sys

# Add src directory to path so we can import our modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from errors import BootstrapError
from logger import get_logger
from trust_store import load_trust_store, save_pkcs12_trust_store

logger = get_logger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Build a password-protected PKCS#12 trust store from PEM CA certificates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # MongoDB server CA into the default trust store location
  python scripts/make_truststore.py certs/ca.pem

  # Several CAs, custom location and password
  python scripts/make_truststore.py ca1.pem ca2.pem --out /tmp/trust.p12 --password s3cret
        """
    )

    parser.add_argument(
        "pem_files",
        nargs="+",
        help="PEM files holding the CA certificates to trust",
    )

    parser.add_argument(
        "--out",
        default="./truststore/mongo-truststore.jks",
        help="Trust store to write (default: ./truststore/mongo-truststore.jks)",
    )

    parser.add_argument(
        "--password",
        default="changeit",
        help="Trust store password (default: changeit)",
    )

    args = parser.parse_args()

    certificates = []
    try:
        for pem_file in args.pem_files:
            certificates.extend(load_trust_store(pem_file, None).certificates)

        out_dir = os.path.dirname(args.out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)

        save_pkcs12_trust_store(certificates, args.out, args.password)

        # Read it back with the password so a broken store never goes unnoticed
        material = load_trust_store(args.out, args.password)
    except BootstrapError as e:
        logger.error(f"Could not build trust store: {e}")
        sys.exit(1)

    logger.info(f"Trust store {args.out} holds {len(material)} certificate(s):")
    for subject in material.subjects():
        logger.info(f"  {subject}")


if __name__ == "__main__":
    main()
