import logging
import re
from typing import Any, Dict, List
from urllib.parse import urlparse

from pydantic import ValidationError

from config.settings import get_settings
from models.team_member import TeamMember

logger = logging.getLogger(__name__)


class RecordValidator:
    def __init__(self):
        self.validation_stats = {
            'total_records': 0,
            'valid_records': 0,
            'invalid_records': 0,
            'validation_errors': [],
            'validation_warnings': 0,
        }

    def validate_url(self, url: Any) -> bool:
        """Validate an http(s) link."""
        if not url or not isinstance(url, str):
            return False

        parsed = urlparse(url)
        return parsed.scheme in ['http', 'https'] and bool(parsed.netloc)

    def validate_required_fields(self, entry: Dict, label: str) -> List[str]:
        """Check if all required fields are present and non-empty."""
        errors = []

        settings = get_settings()
        for field in settings.required_fields:
            value = entry.get(field)
            # records built in code may use the model name instead of the source key
            if value is None and field == 'jobTitle':
                value = entry.get('title')
            if value is None or (isinstance(value, str) and not value.strip()):
                errors.append(f"{label}: missing required field: {field}")

        return errors

    def validate_optional_fields(self, entry: Dict, label: str) -> List[str]:
        """Validate optional fields if present. Problems here are warnings only."""
        warnings = []

        settings = get_settings()
        for field in settings.optional_fields:
            value = entry.get(field)
            if not value:
                continue

            if field == 'email':
                if not re.match(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$", str(value)):
                    warnings.append(f"{label}: email format looks invalid")
            if field == 'phone':
                digits = re.sub(r"\D", "", str(value))
                if len(digits) < 7:
                    warnings.append(f"{label}: phone number too short to be valid")
            if field == 'bio' and len(str(value)) > 2000:
                warnings.append(f"{label}: bio too long: {len(str(value))} characters")
            if field == 'socialLinks' and isinstance(value, dict):
                # source keys (linkedin) and channel names (professional-network) are both kept
                accepted = set(settings.link_channels) | set(settings.link_channels.values())
                for key, url in value.items():
                    if key not in accepted:
                        warnings.append(f"{label}: unknown social link '{key}' ignored")
                    elif url and not self.validate_url(url):
                        warnings.append(f"{label}: {key} link should be an http(s) URL")

        return warnings

    def validate_record(self, entry: Any, index: int) -> Dict[str, Any]:
        """Validate a single source entry and build its record when valid."""
        label = f"entry {index + 1}"
        result = {
            'is_valid': True,
            'errors': [],
            'warnings': [],
            'record': None,
        }

        if not isinstance(entry, dict):
            result['errors'].append(f"{label}: expected an object, got {type(entry).__name__}")
        else:
            if entry.get('id') is not None:
                label = f"entry {index + 1} (id={entry.get('id')!r})"
            result['errors'].extend(self.validate_required_fields(entry, label))
            result['warnings'].extend(self.validate_optional_fields(entry, label))

        if not result['errors']:
            try:
                result['record'] = TeamMember.model_validate(entry)
            except ValidationError as e:
                for err in e.errors():
                    loc = '.'.join(str(p) for p in err.get('loc', ())) or 'record'
                    result['errors'].append(f"{label}: {loc}: {err.get('msg')}")

        result['is_valid'] = len(result['errors']) == 0

        self.validation_stats['total_records'] += 1
        self.validation_stats['validation_warnings'] += len(result['warnings'])
        if result['is_valid']:
            self.validation_stats['valid_records'] += 1
        else:
            self.validation_stats['invalid_records'] += 1
            self.validation_stats['validation_errors'].extend(result['errors'])

        return result

    def validate_unique_ids(self, records: List[TeamMember]) -> List[str]:
        """Report every id that appears more than once."""
        seen = set()
        reported = set()
        errors = []
        for record in records:
            if record.id in seen and record.id not in reported:
                reported.add(record.id)
                errors.append(f"duplicate id: {record.id}")
            seen.add(record.id)
        self.validation_stats['validation_errors'].extend(errors)
        return errors

    def validate_all_records(self, entries: List[Any]) -> Dict[str, Any]:
        """Validate every entry. Returns built records plus all errors found."""
        records: List[TeamMember] = []
        errors: List[str] = []

        logger.info(f"Starting validation of {len(entries)} records", extra={"step": "validate"})

        for i, entry in enumerate(entries):
            result = self.validate_record(entry, i)
            if result['is_valid']:
                records.append(result['record'])
                for warning in result['warnings']:
                    logger.warning(warning, extra={"step": "validate", "status": "warning"})
            else:
                errors.extend(result['errors'])

        errors.extend(self.validate_unique_ids(records))

        logger.info(
            f"Validation completed. Valid: {self.validation_stats['valid_records']}, "
            f"Invalid: {self.validation_stats['invalid_records']}",
            extra={"step": "validate", "status": "error" if errors else "ok"},
        )

        return {'records': records, 'errors': errors}

    def get_validation_stats(self) -> Dict[str, Any]:
        return dict(self.validation_stats)
