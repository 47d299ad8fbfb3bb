from registry.models import Director, Movie


SAMPLE_MOVIES = [
    {
        'id': '1',
        'isbn': '438227',
        'title': 'Movie One',
        'director': {'first_name': 'John', 'last_name': 'Doe'}
    },
    {
        'id': '2',
        'isbn': '45455',
        'title': 'Movie Two',
        'director': {'first_name': 'Jane', 'last_name': 'Doe'}
    }
]


def get_sample_movies():
    return [
        Movie(
            id=data['id'],
            isbn=data['isbn'],
            title=data['title'],
            director=Director(**data['director'])
        )
        for data in SAMPLE_MOVIES
    ]


def load_sample_movies(registry):
    return registry.load(get_sample_movies())
