"""
Ошибки ядра FitTrack.

Неверный пользовательский ввод ошибкой не считается: действие просто
игнорируется на границе. Отсутствующие необязательные данные возвращаются
как None. Исключения ниже означают либо сбой хранилища, либо неверное
использование API.
"""


class FitTrackError(Exception):
    """Базовое исключение приложения."""


class PersistenceError(FitTrackError):
    """Хранилище недоступно или запись не удалась; операцию можно повторить."""


class SessionStateError(FitTrackError):
    """Переход недопустим в текущем состоянии тренировки."""


class TemplateNotFoundError(FitTrackError):
    def __init__(self, template_id: str):
        super().__init__(f"Unknown program template: {template_id}")
        self.template_id = template_id


class ProfileExistsError(FitTrackError):
    """Профиль уже создан, второй на устройстве не допускается."""
