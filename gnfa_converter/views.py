from django.http import JsonResponse
from django.views.decorators.http import require_POST
from django.views.decorators.csrf import csrf_exempt
import json
import logging
from .automaton import Automaton
from .regex_conversions import nfa_to_regex

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
def convert_nfa_to_regex(request):
    """
    Django view to handle **NFA → regex** conversion requests.

    Expects a POST request with a JSON body containing:
    - automaton: {'start', 'states', 'edges', 'accept'} (see Automaton.from_dict)
    - verify: Optional flag to check the result by language equivalence

    Returns a JSON response with the regular expression and conversion details.
    """
    try:
        data = json.loads(request.body)
        if not isinstance(data, dict):
            return JsonResponse({'error': 'Request body must be a JSON object'}, status=400)

        automaton_data = data.get('automaton')
        if automaton_data is None:
            return JsonResponse({'error': 'Missing automaton definition'}, status=400)

        verify_result = data.get('verify')
        if verify_result is not None and not isinstance(verify_result, bool):
            return JsonResponse({'error': 'verify must be a boolean'}, status=400)

        # Parse here so structural errors surface as 400 before conversion
        automaton = Automaton.from_dict(automaton_data)
        result = nfa_to_regex(automaton, verify_result=verify_result)

        if not result['valid']:
            return JsonResponse({'error': f"Invalid automaton: {result['error']}"}, status=400)

        return JsonResponse({
            'success': True,
            'regex': result['regex'],
            'empty_language': result['empty_language'],
            'original_states': result['original_states'],
            'eliminated_states': result['eliminated_states'],
            'verification': result['verification'],
            'message': 'NFA converted to regular expression successfully'
        })

    except json.JSONDecodeError:
        return JsonResponse({'error': 'Invalid JSON in request body'}, status=400)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.exception("NFA to regex conversion failed")
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)
