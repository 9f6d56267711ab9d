"""genre-site: 음악 장르 페이지를 렌더링하는 최소 HTTP 서버."""

__version__ = "0.1.0"
