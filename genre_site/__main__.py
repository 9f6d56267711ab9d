"""python -m genre_site"""

from genre_site.app.main import main

main()
