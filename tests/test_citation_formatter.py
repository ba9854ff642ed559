"""Tests for book and venue rendering."""

from citation_tools.models.citation import BookRecord, VenueRecord
from citation_tools.utils.citation_formatter import CitationFormatter


def test_book_key_from_first_author():
    book = BookRecord(title='T', authors=['Donald E. Knuth', 'Someone Else'], year='1997')
    assert CitationFormatter.citation_key(book) == 'knuth1997'


def test_book_key_last_first_order():
    book = BookRecord(authors=["O'Neil, Cathy"], year='2016')
    assert CitationFormatter.citation_key(book) == 'oneil2016'


def test_book_key_falls_back_to_isbn():
    assert CitationFormatter.citation_key(BookRecord(isbn='0262033844')) == 'isbn0262033844'


def test_book_entry_skips_missing_fields():
    book = BookRecord(title='Introduction to Algorithms',
                      authors=['Thomas H. Cormen', 'Charles E. Leiserson'],
                      isbn='0262033844')

    assert CitationFormatter.format_book_bibtex(book) == (
        "@book{cormen,\n"
        "  title = {Introduction to Algorithms},\n"
        "  author = {Thomas H. Cormen and Charles E. Leiserson},\n"
        "  isbn = {0262033844}\n"
        "}"
    )


def test_venue_with_and_without_publisher():
    assert CitationFormatter.format_venue(VenueRecord('Nature', 'Springer Nature')) == 'Nature (Springer Nature)'
    assert CitationFormatter.format_venue(VenueRecord('PeerJ')) == 'PeerJ'
    assert CitationFormatter.format_venue(VenueRecord('')) is None
