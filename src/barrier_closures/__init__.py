"""Level crossing barrier closure windows from the Yandex.Rasp arrival schedule."""
