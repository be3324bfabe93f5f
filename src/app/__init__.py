"""
Прикладной слой: каталог функций, конфигурация, логирование, воркер, CLI.

Тонкие адаптеры над библиотекой: выбор функции по имени, потолки входов,
вынос вычисления из интерактивного потока.
"""
