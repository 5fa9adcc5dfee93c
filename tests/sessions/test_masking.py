from src.event_checkin.event_checkin.sessions.masking import mask_document, mask_email, mask_phone


def test_mask_email_keeps_two_leading_chars_and_domain():
    assert mask_email("nadir@example.com") == "na***@example.com"
    assert mask_email("a@example.com") == "a@example.com"
    assert mask_email("") == ""


def test_mask_phone_keeps_last_four_and_punctuation():
    assert mask_phone("(555) 123-4567") == "(***) ***-4567"
    assert mask_phone("1234") == "1234"


def test_mask_document_covers_both_roster_kinds():
    document = {
        "eventDate": "November 8, 2025",
        "sessions": [
            {"id": "s1", "employees": [{"fullName": "X", "email": "xavier@a.com", "phone": "5551234567"}]},
            {"id": "s2", "registrations": [{"firstName": "Y", "email": "yolanda@b.com", "phone": "5557654321"}]},
        ],
    }

    masked = mask_document(document)

    assert masked["sessions"][0]["employees"][0]["email"] == "xa****@a.com"
    assert masked["sessions"][1]["registrations"][0]["phone"] == "******4321"
    assert masked["sessions"][0]["employees"][0]["fullName"] == "X"
    # input untouched
    assert document["sessions"][0]["employees"][0]["email"] == "xavier@a.com"
