"""Built-in publication source table used when none has been saved."""

from __future__ import annotations

from ..schemas import PublicationSource


def _source(
    id: str, name: str, category: str, points: int, description: str | None = None
) -> PublicationSource:
    return PublicationSource(
        id=id, name=name, category=category, points=points, description=description
    )


DEFAULT_PUBLICATION_SOURCES: tuple[PublicationSource, ...] = (
    # High-tier journals (24-25)
    _source("1", "Nature", "Top-tier Journal", 25, "Multidisciplinary science journal"),
    _source("2", "Science", "Top-tier Journal", 25, "Premier scientific journal"),
    _source("3", "Cell", "Top-tier Journal", 24, "Leading life sciences journal"),
    _source("4", "NEJM", "Top-tier Journal", 24, "New England Journal of Medicine"),
    # IEEE tier 1 (20-22)
    _source("5", "IEEE Transactions on Pattern Analysis and Machine Intelligence", "IEEE Tier 1", 22),
    _source("6", "IEEE Transactions on Information Theory", "IEEE Tier 1", 21),
    _source("7", "IEEE Transactions on Signal Processing", "IEEE Tier 1", 20),
    _source("8", "IEEE Transactions on Computers", "IEEE Tier 1", 20),
    # ACM tier 1 (19-22)
    _source("9", "ACM Transactions on Graphics", "ACM Tier 1", 22),
    _source("10", "ACM Computing Surveys", "ACM Tier 1", 21),
    _source("11", "Communications of the ACM", "ACM Tier 1", 19),
    # Top conferences (18-20)
    _source("12", "NeurIPS", "Top Conference", 20, "Neural Information Processing Systems"),
    _source("13", "ICML", "Top Conference", 20, "International Conference on Machine Learning"),
    _source("14", "ICCV", "Top Conference", 19, "International Conference on Computer Vision"),
    _source("15", "CVPR", "Top Conference", 19, "Computer Vision and Pattern Recognition"),
    _source("16", "SIGCOMM", "Top Conference", 18),
    _source("17", "SIGMOD", "Top Conference", 18),
    # High-impact journals (14-18)
    _source("18", "Journal of Machine Learning Research", "High-impact Journal", 18),
    _source("19", "Artificial Intelligence", "High-impact Journal", 17),
    _source("20", "Pattern Recognition", "High-impact Journal", 16),
    _source("21", "Computer Vision and Image Understanding", "High-impact Journal", 15),
    _source("22", "Information Sciences", "High-impact Journal", 14),
    # Regional and specialised conferences (12-17)
    _source("23", "ECCV", "Regional Conference", 15, "European Conference on Computer Vision"),
    _source("24", "AAAI", "Regional Conference", 14),
    _source("25", "IJCAI", "Regional Conference", 14),
    _source("26", "ICASSP", "Regional Conference", 12),
    _source("27", "ICLR", "Regional Conference", 17),
    # Standard journals (8-10)
    _source("28", "Expert Systems with Applications", "Standard Journal", 10),
    _source("29", "Neurocomputing", "Standard Journal", 9),
    _source("30", "Applied Soft Computing", "Standard Journal", 8),
    _source("31", "Knowledge-Based Systems", "Standard Journal", 10),
    # Workshops and local venues (5-7)
    _source("32", "Workshop Paper", "Workshop", 5),
    _source("33", "Local Conference", "Local Conference", 6),
    _source("34", "Symposium", "Symposium", 7),
    # Everything else (1-12)
    _source("35", "ArXiv Preprint", "Preprint", 2),
    _source("36", "Technical Report", "Report", 3),
    _source("37", "Book Chapter", "Book", 8),
    _source("38", "Patent", "Patent", 12),
    _source("39", "Other", "Other", 1),
)


def default_sources() -> list[PublicationSource]:
    """Return fresh copies of the built-in table."""
    return [source.model_copy() for source in DEFAULT_PUBLICATION_SOURCES]
