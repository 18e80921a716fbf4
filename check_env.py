#!/usr/bin/env python3
"""Helper script to check and create the .env file for the intake API."""

from pathlib import Path

TEMPLATE = """# Execution mode: development, test or production (test disables geocoding)
INTAKE_ENVIRONMENT=development
INTAKE_LOG_LEVEL=INFO

# Geocoding provider: google, nominatim or none
INTAKE_GEOCODER_PROVIDER=google
INTAKE_GEOCODER_API_KEY=your-google-maps-key-here
# INTAKE_GEOCODER_BASE_URL=http://localhost:8080

# Optional questionnaire definitions replacing the built-in ones
# INTAKE_QUESTIONNAIRE_FILE=./data/questionnaires.json

# Supabase Configuration (customers are kept in memory when unset)
INTAKE_SUPABASE_URL=https://your-project-id.supabase.co
INTAKE_SUPABASE_KEY=your-service-role-key-here
"""

SECRET_KEYS = ("INTAKE_SUPABASE_KEY", "INTAKE_GEOCODER_API_KEY")


def _mask(line: str) -> str:
    name, _, value = line.partition("=")
    value = value.strip()
    if name.strip() in SECRET_KEYS and len(value) > 20:
        return f"{name}={value[:8]}...{value[-4:]}"
    return line


def main():
    env_file = Path(__file__).parent / ".env"

    print("=" * 60)
    print("Intake API Environment Checker")
    print("=" * 60)

    if not env_file.exists():
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"Created template .env at: {env_file}")
        print("Fill in the geocoder and Supabase values, then re-run this script.")
        return

    print(f"Found .env file at: {env_file}")
    print("-" * 60)
    configured = {}
    for line in env_file.read_text(encoding="utf-8").splitlines():
        print(_mask(line))
        if line and not line.lstrip().startswith("#") and "=" in line:
            name, _, value = line.partition("=")
            configured[name.strip()] = value.strip()
    print("-" * 60)

    provider = configured.get("INTAKE_GEOCODER_PROVIDER", "google")
    if provider == "google" and not configured.get("INTAKE_GEOCODER_API_KEY"):
        print("Warning: google geocoding needs INTAKE_GEOCODER_API_KEY")
    if not configured.get("INTAKE_SUPABASE_URL") or not configured.get("INTAKE_SUPABASE_KEY"):
        print("Note: Supabase not configured; customers will only be kept in memory")


if __name__ == "__main__":
    main()
