"""
usequence - Sekvencer kurseva (katalog -> plan studija po semestrima)

Pipeline:  CSV katalog -> Lexer -> Parser -> stabla preduslova -> Course
           -> Validator -> Sequencer -> Term lista -> Generatori

Modul ne sadrzi nikakve podrazumijevane vrijednosti konfiguracije
(pocetna godina, sezona, kapacitet termina). Sva konfiguracija dolazi
iz pozivatelja (cat2seq.py, server.py).

Autor: Ernedin Zajko <ezajko@root.ba>
"""
