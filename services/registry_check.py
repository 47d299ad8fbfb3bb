from config import Config


def check_registry(registry):
    try:
        movie_count = len(registry)
        id_limit = registry.id_limit
        usage = round((movie_count / id_limit) * 100, 4) if id_limit > 0 else 100

        if movie_count >= id_limit:
            return {
                'status': 'unhealthy',
                'service': 'registry',
                'message': 'No free movie ids left',
                'details': {
                    'movies': movie_count,
                    'id_limit': id_limit
                }
            }

        return {
            'status': 'healthy',
            'service': 'registry',
            'message': 'In-memory registry is available',
            'details': {
                'movies': movie_count,
                'id_limit': id_limit,
                'id_space_used_percent': usage,
                'sample_movies_loaded': Config.LOAD_SAMPLE_MOVIES
            }
        }

    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': 'registry',
            'message': f'Unexpected error: {str(e)}'
        }
