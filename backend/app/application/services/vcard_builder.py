"""vCard 3.0 export for cards, contacts and user profiles.

Field mapping is fixed so the files import the same way into contact apps as
the ones the web client produced.
"""

import re

from app.domain.entities import Contact, DigitalCard, SocialFieldType, User

VCARD_MEDIA_TYPE = "text/vcard; charset=utf-8"


def _wrap(lines: list[str]) -> str:
    return "\n".join(["BEGIN:VCARD", "VERSION:3.0", *lines, "END:VCARD"])


def build_card_vcard(card: DigitalCard) -> str:
    lines = [
        f"FN:{card.display_name}",
        f"N:{card.last_name};{card.first_name};;;",
        f"ORG:{card.company}",
        f"TITLE:{card.job_title}",
    ]
    for field in card.fields:
        if field.type == SocialFieldType.PHONE:
            lines.append(f"TEL;TYPE=CELL:{field.value}")
        elif field.type == SocialFieldType.EMAIL:
            lines.append(f"EMAIL;TYPE=INTERNET:{field.value}")
        elif field.type == SocialFieldType.WEBSITE:
            lines.append(f"URL:{field.value}")
        else:
            lines.append(f"URL;TYPE={field.type.value}:{field.value}")
    return _wrap(lines)


def build_contact_vcard(contact: Contact) -> str:
    notes = (contact.notes or "").replace("\n", "\\n")
    return _wrap([
        f"FN:{contact.name}",
        f"TEL;TYPE=CELL:{contact.phone}",
        f"EMAIL;TYPE=INTERNET:{contact.email}",
        f"URL;TYPE=Linkedin:{contact.linkedin or ''}",
        f"CATEGORIES:{contact.tag or ''}",
        f"NOTE:{notes}",
    ])


def build_user_vcard(user: User, organization: str) -> str:
    first_name, _, last_name = user.name.partition(" ")
    return _wrap([
        f"FN:{user.name}",
        f"N:{last_name.strip()};{first_name};;;",
        f"ORG:{organization};{user.department}",
        f"TITLE:{user.position}",
        f"TEL;TYPE=WORK,VOICE:{user.phone}",
        f"EMAIL;TYPE=WORK:{user.email}",
        f"ROLE:{user.role.value}",
    ])


def card_vcard_filename(card: DigitalCard) -> str:
    return f"{card.first_name}_{card.last_name}.vcf"


def contact_vcard_filename(name: str) -> str:
    return re.sub(r"\s+", "_", name) + "_contact.vcf"
