from reports import create_users_pdf
from user import User


def test_pdf_bytes():
    pdf = create_users_pdf([User(1, "Ann", "ann@x.com"), User(2, "Bo", "bo@x.com")])
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 500


def test_pdf_lists_title_header_and_every_row(pdf_text):
    pdf = create_users_pdf(
        [User(1, "Ann", "ann@x.com"), User(2, "Bo", "bo@x.com")], title="Staff"
    )
    text = pdf_text(pdf)
    for expected in (b"(Staff)", b"(Email)", b"(Ann)", b"(ann@x.com)", b"(Bo)", b"(bo@x.com)"):
        assert expected in text


def test_long_values_are_truncated(pdf_text):
    email = "someone." + "x" * 60 + "@example.com"
    text = pdf_text(create_users_pdf([User(1, "Ann", email)]))
    assert email.encode() not in text
    assert (email[:45] + "...").encode() in text
