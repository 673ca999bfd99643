"""
Static mod catalog tables.

SUPPORTED_MODS: acronym -> display name, category and allowed setting keys.
SETTING_SPECS: setting key -> type, bounds, default and per-mod overrides.
CONFLICT_GROUPS: labelled sets of acronyms that may not be combined.
MODE_SPECIFIC_MODS: mods restricted to a single game mode.
"""

SUPPORTED_MODS = {
    # Difficulty Reduction
    'EZ': {'name': 'Easy', 'category': 'Difficulty Reduction', 'settings': []},
    'NF': {'name': 'No Fail', 'category': 'Difficulty Reduction', 'settings': []},
    'HT': {'name': 'Half Time', 'category': 'Difficulty Reduction', 'settings': ['speed_change', 'adjust_pitch']},
    'DC': {'name': 'Daycore', 'category': 'Difficulty Reduction', 'settings': ['speed_change']},

    # Difficulty Increase
    'HR': {'name': 'Hard Rock', 'category': 'Difficulty Increase', 'settings': []},
    'SD': {'name': 'Sudden Death', 'category': 'Difficulty Increase', 'settings': ['restart', 'fail_on_slider_tail']},
    'PF': {'name': 'Perfect', 'category': 'Difficulty Increase', 'settings': ['restart']},
    'DT': {'name': 'Double Time', 'category': 'Difficulty Increase', 'settings': ['speed_change', 'adjust_pitch']},
    'NC': {'name': 'Nightcore', 'category': 'Difficulty Increase', 'settings': ['speed_change']},
    'HD': {'name': 'Hidden', 'category': 'Difficulty Increase', 'settings': ['only_fade_approach_circles']},
    'FL': {'name': 'Flashlight', 'category': 'Difficulty Increase',
           'settings': ['size_multiplier', 'combo_based_size', 'follow_delay']},
    'AC': {'name': 'Accuracy Challenge', 'category': 'Difficulty Increase',
           'settings': ['minimum_accuracy', 'accuracy_judge_mode', 'restart']},
    'BL': {'name': 'Blinds', 'category': 'Difficulty Increase', 'settings': []},

    # Automation
    'AT': {'name': 'Autoplay', 'category': 'Automation', 'settings': []},
    'CN': {'name': 'Cinema', 'category': 'Automation', 'settings': []},
    'RL': {'name': 'Relax', 'category': 'Automation', 'settings': []},
    'RX': {'name': 'Relax', 'category': 'Automation', 'settings': []},
    'AP': {'name': 'Autopilot', 'category': 'Automation', 'settings': []},
    'SO': {'name': 'Spun Out', 'category': 'Automation', 'settings': []},

    # Conversion
    'MR': {'name': 'Mirror', 'category': 'Conversion', 'settings': ['reflection']},
    'DA': {'name': 'Difficulty Adjust', 'category': 'Conversion',
           'settings': ['circle_size', 'drain_rate', 'overall_difficulty', 'approach_rate', 'scroll_speed']},
    'CL': {'name': 'Classic', 'category': 'Conversion',
           'settings': ['no_slider_head_accuracy', 'classic_note_lock', 'always_play_tail_sample',
                        'fade_hit_circle_early', 'classic_health']},
    'RD': {'name': 'Random', 'category': 'Conversion', 'settings': ['seed', 'angle_sharpness']},
    'TP': {'name': 'Target Practice', 'category': 'Conversion', 'settings': ['seed', 'metronome']},
    'FR': {'name': 'Freeze Frame', 'category': 'Conversion', 'settings': []},
    'ST': {'name': 'Strict Tracking', 'category': 'Conversion', 'settings': []},

    # Fun
    'WU': {'name': 'Wind Up', 'category': 'Fun', 'settings': ['initial_rate', 'final_rate', 'adjust_pitch']},
    'WD': {'name': 'Wind Down', 'category': 'Fun', 'settings': ['initial_rate', 'final_rate', 'adjust_pitch']},
    'AS': {'name': 'Adaptive Speed', 'category': 'Fun', 'settings': ['initial_rate', 'adjust_pitch']},
    'AD': {'name': 'Approach Different', 'category': 'Fun', 'settings': ['initial_size', 'style']},
    'MU': {'name': 'Muted', 'category': 'Fun',
           'settings': ['start_muted', 'enable_metronome', 'final_volume_combo_count', 'mute_hit_sounds']},
    'DF': {'name': 'Deflate', 'category': 'Fun', 'settings': ['start_scale']},
    'GR': {'name': 'Grow', 'category': 'Fun', 'settings': ['start_scale']},
    'SI': {'name': 'Spin In', 'category': 'Fun', 'settings': []},
    'TC': {'name': 'Traceable', 'category': 'Fun', 'settings': []},
    'BR': {'name': 'Barrel Roll', 'category': 'Fun', 'settings': ['spin_speed', 'direction']},
    'DP': {'name': 'Depth', 'category': 'Fun', 'settings': ['max_depth', 'show_approach_circles']},
    'TR': {'name': 'Transform', 'category': 'Fun', 'settings': []},
    'WG': {'name': 'Wiggle', 'category': 'Fun', 'settings': ['strength']},
    'MG': {'name': 'Magnetised', 'category': 'Fun', 'settings': ['attraction_strength']},
    'RP': {'name': 'Repel', 'category': 'Fun', 'settings': ['repulsion_strength']},
    'BU': {'name': 'Bubbles', 'category': 'Fun', 'settings': []},
    'SY': {'name': 'Synesthesia', 'category': 'Fun', 'settings': []},
    'BM': {'name': 'Bloom', 'category': 'Fun', 'settings': ['max_size_combo_count', 'max_cursor_size']},
    'NS': {'name': 'No Scope', 'category': 'Fun', 'settings': ['hidden_combo_count']},
    'AL': {'name': 'Alternate', 'category': 'Fun', 'settings': []},
    'SG': {'name': 'Single Tap', 'category': 'Fun', 'settings': []},

    # System
    'TD': {'name': 'Touch Device', 'category': 'System', 'settings': []},
    'SV2': {'name': 'Score V2', 'category': 'System', 'settings': []},

    # osu!mania key mods
    '1K': {'name': '1 Key', 'category': 'osu!mania', 'settings': []},
    '2K': {'name': '2 Keys', 'category': 'osu!mania', 'settings': []},
    '3K': {'name': '3 Keys', 'category': 'osu!mania', 'settings': []},
    '4K': {'name': '4 Keys', 'category': 'osu!mania', 'settings': []},
    '5K': {'name': '5 Keys', 'category': 'osu!mania', 'settings': []},
    '6K': {'name': '6 Keys', 'category': 'osu!mania', 'settings': []},
    '7K': {'name': '7 Keys', 'category': 'osu!mania', 'settings': []},
    '8K': {'name': '8 Keys', 'category': 'osu!mania', 'settings': []},
    '9K': {'name': '9 Keys', 'category': 'osu!mania', 'settings': []},
    '10K': {'name': '10 Keys', 'category': 'osu!mania', 'settings': []},

    # osu!mania specific
    'DS': {'name': 'Dual Stages', 'category': 'osu!mania', 'settings': []},
    'IN': {'name': 'Invert', 'category': 'osu!mania', 'settings': []},
    'CS': {'name': 'Constant Speed', 'category': 'osu!mania', 'settings': ['scroll_speed']},
    'HO': {'name': 'Hold Off', 'category': 'osu!mania', 'settings': []},
    'NR': {'name': 'No Release', 'category': 'osu!mania', 'settings': []},
    'FI': {'name': 'Fade In', 'category': 'osu!mania', 'settings': []},
    'CO': {'name': 'Cover', 'category': 'osu!mania', 'settings': []},

    # Mode specific
    'SW': {'name': 'Swap', 'category': 'Mode Specific', 'settings': []},
    'SR': {'name': 'Simplified Rhythm', 'category': 'Mode Specific', 'settings': []},
    'FF': {'name': 'Floating Fruits', 'category': 'Mode Specific', 'settings': []},
    'MF': {'name': 'Moving Fast', 'category': 'Mode Specific', 'settings': []},
}

SETTING_SPECS = {
    # Speed/Rate
    'speed_change': {
        'type': 'number', 'label': 'Speed Change', 'default': 1.5,
        'min': 1.01, 'max': 2.0, 'precision': 0.01,
        'overrides': {
            'HT': {'default': 0.75, 'min': 0.5, 'max': 0.99},
            'DC': {'default': 0.75, 'min': 0.5, 'max': 0.99},
        },
    },
    'adjust_pitch': {'type': 'boolean', 'label': 'Adjust Pitch', 'default': False},

    # Wind Up/Down, Adaptive Speed
    'initial_rate': {
        'type': 'number', 'label': 'Initial Rate', 'default': 1.0,
        'min': 0.5, 'max': 2.0, 'precision': 0.01,
        'overrides': {
            'WU': {'max': 1.99},
            'WD': {'min': 0.51},
        },
    },
    'final_rate': {
        'type': 'number', 'label': 'Final Rate', 'default': 1.5,
        'min': 0.51, 'max': 2.0, 'precision': 0.01,
        'overrides': {
            'WD': {'default': 0.75, 'min': 0.5, 'max': 1.99},
        },
    },

    # Fail conditions
    'restart': {'type': 'boolean', 'label': 'Auto Restart on Fail', 'default': False},
    'fail_on_slider_tail': {'type': 'boolean', 'label': 'Fail on Slider Tail Miss', 'default': False},

    # Accuracy Challenge
    'minimum_accuracy': {
        'type': 'number', 'label': 'Minimum Accuracy', 'default': 0.9,
        'min': 0.6, 'max': 0.99, 'precision': 0.01,
    },
    'accuracy_judge_mode': {
        'type': 'choice', 'label': 'Accuracy Mode', 'default': 'Standard',
        'options': ['Standard', 'MaximumAchievable'],
    },

    # Hidden
    'only_fade_approach_circles': {'type': 'boolean', 'label': 'Only Fade Approach Circles', 'default': False},

    # Flashlight
    'size_multiplier': {
        'type': 'number', 'label': 'Size Multiplier', 'default': 1.0,
        'min': 0.5, 'max': 2.0, 'precision': 0.1,
    },
    'combo_based_size': {'type': 'boolean', 'label': 'Combo Based Size', 'default': True},
    'follow_delay': {
        'type': 'number', 'label': 'Follow Delay', 'default': 120.0,
        'min': 120.0, 'max': 1200.0, 'precision': 1.0,
    },

    # Mirror
    'reflection': {'type': 'integer', 'label': 'Reflection Type', 'default': 0, 'min': 0, 'max': 2},

    # Difficulty Adjust; no default means "use the beatmap value"
    'circle_size': {
        'type': 'number', 'label': 'Circle Size', 'default': None,
        'min': 0.0, 'max': 11.0, 'precision': 0.1,
    },
    'drain_rate': {
        'type': 'number', 'label': 'Drain Rate', 'default': None,
        'min': 0.0, 'max': 11.0, 'precision': 0.1,
    },
    'overall_difficulty': {
        'type': 'number', 'label': 'Overall Difficulty', 'default': None,
        'min': 0.0, 'max': 11.0, 'precision': 0.1,
    },
    'approach_rate': {
        'type': 'number', 'label': 'Approach Rate', 'default': None,
        'min': -10.0, 'max': 11.0, 'precision': 0.1,
    },
    'scroll_speed': {
        'type': 'number', 'label': 'Scroll Speed', 'default': 1.5,
        'min': 0.01, 'max': 4.0, 'precision': 0.01,
    },

    # Classic
    'no_slider_head_accuracy': {'type': 'boolean', 'label': 'No Slider Head Accuracy', 'default': True},
    'classic_note_lock': {'type': 'boolean', 'label': 'Classic Note Lock', 'default': True},
    'always_play_tail_sample': {'type': 'boolean', 'label': 'Always Play Tail Sample', 'default': True},
    'fade_hit_circle_early': {'type': 'boolean', 'label': 'Fade Hit Circle Early', 'default': True},
    'classic_health': {'type': 'boolean', 'label': 'Classic Health', 'default': True},

    # Random
    'seed': {'type': 'integer', 'label': 'Random Seed', 'default': 0},
    'angle_sharpness': {
        'type': 'number', 'label': 'Angle Sharpness', 'default': 7.0,
        'min': 1.0, 'max': 10.0, 'precision': 0.1,
    },

    # Target Practice
    'metronome': {'type': 'boolean', 'label': 'Enable Metronome', 'default': True},

    # Approach Different
    'initial_size': {
        'type': 'number', 'label': 'Initial Size', 'default': 4.0,
        'min': 1.5, 'max': 10.0, 'precision': 0.1,
    },
    'style': {'type': 'integer', 'label': 'Animation Style', 'default': 0, 'min': 0, 'max': 9},

    # Muted
    'start_muted': {'type': 'boolean', 'label': 'Start Muted', 'default': False},
    'enable_metronome': {'type': 'boolean', 'label': 'Enable Metronome', 'default': True},
    'final_volume_combo_count': {
        'type': 'integer', 'label': 'Final Volume at Combo Count', 'default': 100, 'min': 0, 'max': 500,
    },
    'mute_hit_sounds': {'type': 'boolean', 'label': 'Mute Hit Sounds', 'default': True},

    # Deflate/Grow
    'start_scale': {
        'type': 'number', 'label': 'Start Scale', 'default': 2.0,
        'min': 1.0, 'max': 25.0, 'precision': 0.1,
        'overrides': {
            'GR': {'default': 0.5, 'min': 0.0, 'max': 0.99, 'precision': 0.01},
        },
    },

    # Barrel Roll
    'spin_speed': {
        'type': 'number', 'label': 'Spin Speed', 'default': 0.5,
        'min': 0.02, 'max': 12.0, 'precision': 0.01,
    },
    'direction': {
        'type': 'choice', 'label': 'Direction of Rotation', 'default': 'Clockwise',
        'options': ['Clockwise', 'Counterclockwise'],
    },

    # Depth
    'max_depth': {'type': 'integer', 'label': 'Max Depth', 'default': 100, 'min': 50, 'max': 200},
    'show_approach_circles': {'type': 'boolean', 'label': 'Show Approach Circles', 'default': True},

    # Wiggle
    'strength': {
        'type': 'number', 'label': 'Wiggle Strength', 'default': 1.0,
        'min': 0.1, 'max': 2.0, 'precision': 0.1,
    },

    # Magnetised/Repel
    'attraction_strength': {
        'type': 'number', 'label': 'Attraction Strength', 'default': 0.5,
        'min': 0.05, 'max': 1.0, 'precision': 0.05,
    },
    'repulsion_strength': {
        'type': 'number', 'label': 'Repulsion Strength', 'default': 0.5,
        'min': 0.05, 'max': 1.0, 'precision': 0.05,
    },

    # Bloom
    'max_size_combo_count': {'type': 'integer', 'label': 'Max Size Combo Count', 'default': 50, 'min': 5, 'max': 100},
    'max_cursor_size': {
        'type': 'number', 'label': 'Max Cursor Size', 'default': 10.0,
        'min': 5.0, 'max': 15.0, 'precision': 0.1,
    },

    # No Scope
    'hidden_combo_count': {'type': 'integer', 'label': 'Hidden Combo Count', 'default': 10, 'min': 0, 'max': 50},
}

# Groups may overlap; each one is checked on its own.
CONFLICT_GROUPS = [
    {'name': 'Speed/Rate', 'mods': ['HT', 'DC', 'DT', 'NC', 'WU', 'WD', 'AS']},
    {'name': 'Difficulty adjustment', 'mods': ['EZ', 'HR']},
    {'name': 'Fail conditions', 'mods': ['NF', 'SD', 'PF', 'AC', 'CN']},
    {'name': 'Automation', 'mods': ['AT', 'CN', 'RL', 'RX', 'AP', 'SO']},
    {'name': 'Input modification', 'mods': ['AL', 'SG']},
    {'name': 'Position modification', 'mods': ['MG', 'RP']},
    {'name': 'Visibility', 'mods': ['FI', 'HD', 'FL']},
    {'name': 'Hold notes', 'mods': ['HO', 'NR']},
    {'name': 'Transformation', 'mods': ['TR', 'WG', 'MG', 'RP', 'BU', 'DP']},
    {'name': 'Target practice', 'mods': ['ST', 'TP', 'SD', 'SO']},
]

MODE_SPECIFIC_MODS = {
    'osu': ['BL', 'AP', 'SO', 'TP', 'FR', 'ST', 'AD', 'DF', 'GR', 'SI', 'TC', 'DP', 'TR', 'WG', 'MG',
            'RP', 'BU', 'BM', 'AL', 'SG', 'TD'],
    'taiko': ['SW', 'SR'],
    'catch': ['FF', 'MF'],
    'mania': ['1K', '2K', '3K', '4K', '5K', '6K', '7K', '8K', '9K', '10K', 'DS', 'IN', 'CS', 'HO',
              'NR', 'FI', 'CO'],
}

# Mods offered first when an extra, compatible mod is needed for an example.
PREFERRED_EXTRA_MODS = ['HD', 'HR', 'NF', 'FL', 'EZ']
